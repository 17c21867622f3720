"""Classic algorithms on lists, strings and matrices: searching, sorting and recursion."""

__version__ = "0.1.0"
__all__ = ["arrays", "searching", "sorting", "matrix", "strings", "stacks", "recursion"]