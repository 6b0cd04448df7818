"""
kubecreate - Declarative resource generation and submission

Turns a command name and user-supplied parameters into a typed API object
and submits it to a versioned, namespaced REST resource store.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- api: Typed API objects and options
- generator: Parameter schemas, generators and their registry
- client: Typed CRUD + watch REST client
- apply: Last-applied-configuration annotation
- command: Create command orchestration and REST mapping
"""

__version__ = "1.0.0"
