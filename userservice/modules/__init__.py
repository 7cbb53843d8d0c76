"""
Infrastructure Modules

Database access, migrations, HTTP plumbing and feature modules.
"""
