"""
Local JSON persistence for carbon records.
"""
