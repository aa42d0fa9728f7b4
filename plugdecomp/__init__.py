"""
plugdecomp - Sets up Gradle workspaces for decompiled Minecraft plugins
"""
__version__ = "0.1.0"
