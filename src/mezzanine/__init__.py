"""
Mezzanine generator: sketch an outline in a building model and create a
platform with enclosing walls at a chosen height.
"""
