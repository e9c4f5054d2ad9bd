"""Spec Kit CLI: the `specify` command."""
