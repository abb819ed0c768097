from .output_sink import FdOutputSink, FileOutputSink, StreamOutputSink, build_output_sink

# Public adapter exports are optional but make wiring simpler.
__all__ = ["FdOutputSink", "FileOutputSink", "StreamOutputSink", "build_output_sink"]
