"""Payment domain package.

This package contains the domain model for PayID resolution: PayIDs,
stored addresses, Accept preferences and the services negotiating
between them.
"""
