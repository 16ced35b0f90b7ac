"""Built-in plugins shipped with compselect."""
