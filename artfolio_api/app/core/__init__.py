"""
Shared infrastructure: settings, logging, database access, security
helpers and the error taxonomy.
"""
