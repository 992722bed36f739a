"""
Command Line Interface Package

CLI for recording and querying expenses.

Command Structure:
- expense-tracker: Main entry point with global options (--path, --project-dir)
- expense-tracker add: Record a new expense
- expense-tracker list / filter / total: Query recorded expenses
- expense-tracker version / config: Utility commands
"""
