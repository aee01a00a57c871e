"""Authentication and authorization.

Learn: Two steps, always in this order on mutating routes:
1. Token verifier (jwt.py) → checks the signed credential, yields Identity
2. Access gate (access.py) → checks Identity.role against the required role

Login (api/auth.py) checks a bcrypt password and mints the credential.
"""
