"""An AVL tree, chained hash tables with a cursor, a bit-filtered tracer and SQL token enums."""

__version__ = "0.1.0"
__all__ = [
    "avltree",
    "hashtable",
    "hashtable_powers",
    "hashtable_utility",
    "hashtable_itr",
    "tracer",
    "sql_enums",
]