"""
Host Package
The modeling-host contract and an in-memory implementation of it.
"""
