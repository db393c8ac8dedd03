# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared core pieces: the primitive type catalog plus spans/diagnostics used by
the validator and the CLI.
"""
