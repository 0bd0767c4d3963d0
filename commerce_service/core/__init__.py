"""Core configuration, errors and dependency providers"""
