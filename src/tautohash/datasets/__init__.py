from .smiles_file import SmilesFormat, iter_records, load_records, prepare_mol, resolve_input_path

__all__ = [
    "SmilesFormat",
    "iter_records",
    "load_records",
    "prepare_mol",
    "resolve_input_path",
]
