"""Minimal example for reading, creating and merging nested YAML data."""

from digmap import from_yaml, merge, to_yaml, with_overwrite


DEFAULTS = """
server:
  host: localhost
  port: 8080
i18n:
  hello:
    se: Hejsan
"""

OVERRIDES = """
server:
  port: 9090
  tls: null
"""


def main() -> None:
    """Dig into a document, add a nested key and merge overrides on top."""
    config = from_yaml(DEFAULTS)
    print("host:", config.dig_string("server", "host"))
    print("missing:", config.dig("server", "tls", "cert"))

    config.dig_mapping("i18n", "hello")["fi"] = "Moi"
    print("hello:", config.dig("i18n", "hello"))

    merged = config.dup()
    merge(merged, from_yaml(OVERRIDES), with_overwrite())
    print("port before:", config.dig("server", "port"), "after:", merged.dig("server", "port"))
    print(to_yaml(merged))


if __name__ == "__main__":
    main()
