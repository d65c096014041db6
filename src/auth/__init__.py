"""
Authentication module for the patient credential service.

This module provides:
- Patient registration with bcrypt-hashed passwords
- Password login, optionally issuing a bearer token
- Signed, time-bounded JWT issuing and verification
- Resolution of the calling patient from an Authorization header
"""
