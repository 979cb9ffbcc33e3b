"""
Processing layers: token analysis primitives and morphology.
"""
