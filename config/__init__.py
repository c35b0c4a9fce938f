"""
Configuration Package

- settings: Static defaults, overridable through environment / .env
- user_config: Per-user YAML file with capture defaults
"""
