"""Widget layout, focus handling and event routing for a small UI toolkit."""

__version__ = "0.1.0"
__all__ = [
    "util",
    "rect",
    "quadtree",
    "composite",
    "manager",
    "row_column",
    "pie_menu",
    "shader",
    "text_field",
]