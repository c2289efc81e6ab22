from .validation import InvalidArgument, validate_parameters
from .generator import generate
from .design import build_design_matrix, encode_categoricals, add_structural_terms
