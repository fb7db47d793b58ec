"""
xgokit - launcher for containerized Go CGO cross compilation.
"""
