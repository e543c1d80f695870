# Repositories package init
"""
Social API: Persistence Adapter
=================================

What:  One repository per table, each behind an abstract capability interface.

Repository Inventory:
    - base.py: BaseRepository, AccountRepositoryBase, MessageRepositoryBase
    - sql.py: SessionRepository (session holder + StorageError translation)
    - account_repository.py: AccountRepository (table `account`)
    - message_repository.py: MessageRepository (table `message`)
"""
