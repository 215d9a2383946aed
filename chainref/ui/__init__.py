"""NiceGUI interface - thin visualization layer for the query controller.

Responsibilities:
    - Question and theme input with blank-question rejection
    - Loading, error, idle and empty-result feedback
    - One card per chain entry with its cross-theme connections

Contains no request logic. Delegates every query to the QueryController.
"""
