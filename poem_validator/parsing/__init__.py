"""Loading of poem documents from YAML."""

from .yaml_parser import YamlParser, yaml_parser, to_json_value

__all__ = ["YamlParser", "yaml_parser", "to_json_value"]
