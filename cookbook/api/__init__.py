"""
Cookbook REST API.

Provides DRF views for:
- Accounts (register, login, delete account)
- Recipe (owner-scoped CRUD + favorite action)
- Category (visible listing, create, guarded delete, recipes action)
- Dashboard, image upload and health
"""
