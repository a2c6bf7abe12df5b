"""
Core systems: configuration, logging, signals, commands and dispatch.
"""
