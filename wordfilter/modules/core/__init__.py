"""
Core modules package
"""
