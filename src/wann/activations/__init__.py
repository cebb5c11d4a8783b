"""
Activations Package

This package provides the fixed set of activation functions a WANN neuron can use.

Exported:
    activations:        Dictionary mapping activation function names to functions
    activation_codes:   Dictionary mapping activation function names to 3-letter codes
    activation_sources: Dictionary mapping activation function names to scalar
                        Python expressions (used when exporting networks as source)
    Individual activation functions: identity_activation, step_activation,
                                     sin_activation, cos_activation, gaussian_activation,
                                     tanh_activation, sigmoid_activation, inverse_activation,
                                     abs_activation, relu_activation
"""

from wann.activations.basic_activations import (
    activations,
    activation_codes,
    activation_sources,
    identity_activation,
    step_activation,
    sin_activation,
    cos_activation,
    gaussian_activation,
    tanh_activation,
    sigmoid_activation,
    inverse_activation,
    abs_activation,
    relu_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'activation_sources',
    'identity_activation',
    'step_activation',
    'sin_activation',
    'cos_activation',
    'gaussian_activation',
    'tanh_activation',
    'sigmoid_activation',
    'inverse_activation',
    'abs_activation',
    'relu_activation'
]
