# Services package init
"""
Social API: Services Layer
============================

What:  Business logic between routes (HTTP) and repositories (persistence).
How:   Services receive a repository through their constructor, apply the
       validation and permission rules, and return Result values.

Service Inventory:
    - AccountService: registration, login, account lookup/update/delete
    - MessageService: message posting, listing, editing, deleting
"""
