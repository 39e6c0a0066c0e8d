"""
Initializes the DBStorage singleton shared by the API and the credential store.
"""
from models.db_storage import DBStorage

storage = DBStorage()
storage.reload()
