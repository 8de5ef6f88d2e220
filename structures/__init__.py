"""
structures/
-----------
Primitive containers.  Public API:

    from structures import Graph, LinkedList, BinaryTree, HashTable
"""

from structures.errors      import (
    VisualizerError, ContainerIntegrityError, UnknownOperationError, InvalidContainerError,
)
from structures.graph       import Graph, GraphNode, GraphEdge
from structures.linked_list import LinkedList, ListNode
from structures.tree        import BinaryTree, TreeNode
from structures.hash_table  import HashTable, HashEntry

__all__ = [
    "Graph",       "GraphNode",  "GraphEdge",
    "LinkedList",  "ListNode",
    "BinaryTree",  "TreeNode",
    "HashTable",   "HashEntry",
    "VisualizerError", "ContainerIntegrityError",
    "UnknownOperationError", "InvalidContainerError",
]
