"""
Core Utilities Package

Chua cac utility modules:
- subprocess_utils: Chay external tools (clipboard commands, fzf)
"""
