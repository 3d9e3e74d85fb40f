"""
Service layer for the demo workflows.

This layer keeps seeding, reporting and error narration out of the
repositories, so the repositories stay a plain storage contract.
"""
