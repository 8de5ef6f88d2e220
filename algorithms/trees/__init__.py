"""
algorithms/trees/
-----------------
Binary tree, BST, min-heap and hash-table operations.
"""

from algorithms.trees import binary_tree_ops, bst_ops, heap_ops, hash_table_ops

__all__ = ["binary_tree_ops", "bst_ops", "heap_ops", "hash_table_ops"]
