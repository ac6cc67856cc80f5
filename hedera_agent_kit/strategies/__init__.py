"""
Transaction execution strategies.

A strategy completes a constructed transaction either by submitting it to
the network or by returning its unsigned bytes for external signing.
"""
