"""
Modules package
"""
