from .fixture_sink import JsonlFixtureSink, StdoutFixtureSink, build_fixture_sink, encode_instance

__all__ = ["JsonlFixtureSink", "StdoutFixtureSink", "build_fixture_sink", "encode_instance"]
