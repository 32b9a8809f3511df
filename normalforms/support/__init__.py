"""Infrastructure that is not specific to logic: the exception hook for
user errors, and helpers for logging.
"""
