"""Support modules of RESTRack dispatch.

Unlike controllers, support modules know nothing about the controllers
they serve and only deal with the url chain, identifiers and responses.
"""
