"""Image resampling: filters, convolution coefficients, fixed-point helpers, convolution passes and alpha handling."""

__version__ = "0.1.0"

__all__ = ["alpha", "coefficients", "convolution", "errors", "filters", "optimisations"]