"""
algorithms/linear/
------------------
Arrays, stacks and queues (plain lists) and the singly-linked list arena.
"""

from algorithms.linear import array_ops, stack_ops, queue_ops, linked_list_ops

__all__ = ["array_ops", "stack_ops", "queue_ops", "linked_list_ops"]
