"""Docset bundle layout, descriptor and assembly."""
