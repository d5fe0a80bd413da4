"""
Test package for ucsb_backend.

This package contains all test files for the ucsb_backend application:
- test_organizations_api.py: endpoint authorization and behaviour tests
- test_repositories.py: repository tests against in-memory SQLite
- test_permissions.py: role hierarchy, principal and token registry tests
- test_interface.py: DTO serialization and validation tests
- test_cli.py: command line tests
"""
