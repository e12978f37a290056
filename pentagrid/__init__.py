"""pentagrid — rhombus tilings dual to de Bruijn multigrids."""

__version__ = "0.1.0"
