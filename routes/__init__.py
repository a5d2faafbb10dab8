"""
HTTP routers for the TeamRAW site API.
"""
