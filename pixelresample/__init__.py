"""Filter kernels, convolution weights and passes for resampling pixel rows, and RGBA alpha multiplication."""

__version__ = "0.1.0"
__all__ = ["alpha", "coefficients", "convolution", "filters", "normalizer"]