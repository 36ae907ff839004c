"""
Service layer abstraction.

Services encapsulate database access so API handlers never issue SQL
themselves.
"""
