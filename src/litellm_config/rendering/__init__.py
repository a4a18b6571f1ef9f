"""Document rendering for built configurations."""

from litellm_config.rendering.yaml_generator import YamlGenerator, classify_model, dump_yaml

__all__ = ["YamlGenerator", "classify_model", "dump_yaml"]
