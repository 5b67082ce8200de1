from .document import analyze_document, analyze_lines, analyze_pair, read_lines
from .frequency import build_frequency_table, count_frequency, is_sorted_table
from .similarity import angle_from_products, inner_product, inner_product_naive, magnitude, vector_angle
from .tokenizer import get_tokenizer, get_words_from_line_list, get_words_from_string

__all__ = [
    "analyze_document",
    "analyze_lines",
    "analyze_pair",
    "read_lines",
    "build_frequency_table",
    "count_frequency",
    "is_sorted_table",
    "angle_from_products",
    "inner_product",
    "inner_product_naive",
    "magnitude",
    "vector_angle",
    "get_tokenizer",
    "get_words_from_line_list",
    "get_words_from_string",
]
