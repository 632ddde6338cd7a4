# Services package init
"""
NYB Restaurant Backend — Services Layer
=========================================

Service Inventory:
    - DocumentStore / DocumentCollection (store_base.py): gateway interface
    - SqlDocumentStore (sql_store.py): async SQLAlchemy implementation
    - InMemoryDocumentStore (memory_store.py): process-local implementation
    - MenuService (menu_service.py): menu list / add / availability / delete
    - OrderService (order_service.py): order list / create / status
"""
