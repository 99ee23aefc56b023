"""
Games module - Bundled board data.

Each board has its own subpackage with:
- Raw board data in the same shape an external loader would supply
- A default setup descriptor
"""
