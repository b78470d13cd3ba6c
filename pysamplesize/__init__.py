"""
PySampleSize: sample size planning for research protocols.

A small, dependency-light engine behind study-design tooling: closed-form
sample sizes for the common hypothesis tests, the z-quantiles they rely on,
and a dropout-adjusted recruitment target.

Usage:
    from pysamplesize import samplesize
    from pysamplesize.samplesize import SampleSizeParams, calculate_sample_size
"""

__version__ = "0.1.0"

from pysamplesize import samplesize
from pysamplesize.samplesize import SampleSizeParams, SampleSizeResult, calculate_sample_size

__all__ = [
    "__version__",
    "samplesize",
    "SampleSizeParams",
    "SampleSizeResult",
    "calculate_sample_size",
]
