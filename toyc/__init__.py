"""Toy C lexer and backtracking parser."""
