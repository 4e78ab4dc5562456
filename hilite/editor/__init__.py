"""
Module: hilite.editor
"""
