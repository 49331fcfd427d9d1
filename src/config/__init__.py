"""YAML configuration files (config.yaml + includes, factory defaults)"""
