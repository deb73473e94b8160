"""
Activation Code Service Django project.
"""
