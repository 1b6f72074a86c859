"""
Version 1 of the API.

Breaking changes to the route contract should go into a new version
subpackage (e.g. ``v2``) so existing storefront builds keep working.
"""
