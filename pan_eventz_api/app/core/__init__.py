"""
Core infrastructure: configuration, logging, security and the stores.

``config`` reads settings from the environment, ``logging_config``
sets up the root logger, ``security`` issues and checks admin tokens,
``db`` is the in-memory database and ``file_storage`` the JSON
collection store.  ``fallbacks`` holds the static content served when
a store cannot answer.
"""
