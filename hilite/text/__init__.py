"""
Module: hilite.text
"""
