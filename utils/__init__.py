"""
utils package
-------------

Shared helpers of the scoring service: configuration constants, the logger,
the election file loader, the election report and request-to-solution builders.
"""
