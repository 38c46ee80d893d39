"""
nugetconf - NuGet package source configuration helper

Adds, removes and lists package sources (with optional credentials) in
nuget.config files, and derives authenticated proxy URLs for build agents.
"""

__version__ = "0.3.0"
