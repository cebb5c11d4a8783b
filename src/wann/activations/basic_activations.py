import numpy as np

def identity_activation(z):
    return z

def step_activation(z):
    return np.where(z > 0.0, 1.0, 0.0)

def sin_activation(z):
    return np.sin(z)

def cos_activation(z):
    return np.cos(z)

def gaussian_activation(z):
    # 'z * z' rather than 'z ** 2' so that huge inputs saturate to 0.0
    return np.exp(-z * z / 2.0)

def tanh_activation(z):
    return np.tanh(z)

def sigmoid_activation(z):
    Z = np.clip(z, -100, 100)   # to prevent under/overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-Z))

def inverse_activation(z):
    # Avoid division by zero or very small values
    # Returns 1e7 for z=0, and caps magnitude at 1e7 for |z| < 1e-7
    z_safe = np.where(z == 0, 1e-7, z)
    z_safe = np.where(np.abs(z_safe) < 1e-7, np.sign(z_safe) * 1e-7, z_safe)
    return 1.0 / z_safe

def abs_activation(z):
    return np.abs(z)

def relu_activation(z):
    return np.maximum(0.0, z)

activations = {
    "identity": identity_activation,
    "step"    : step_activation,
    "sin"     : sin_activation,
    "cos"     : cos_activation,
    "gaussian": gaussian_activation,
    "tanh"    : tanh_activation,
    "sigmoid" : sigmoid_activation,
    "inverse" : inverse_activation,
    "abs"     : abs_activation,
    "relu"    : relu_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "identity": "IDN",
    "step"    : "STP",
    "sin"     : "SIN",
    "cos"     : "COS",
    "gaussian": "GSS",
    "tanh"    : "TNH",
    "sigmoid" : "SIG",
    "inverse" : "INV",
    "abs"     : "ABS",
    "relu"    : "RLU"
    }

# Scalar Python expressions equivalent to each activation function, used when
# exporting a network as source code. '{z}' is replaced by a variable name and
# the expressions may only rely on the 'math' module. They agree with the numpy
# functions on infinite and NaN values too.
activation_sources = {
    "identity": "{z}",
    "step"    : "(1.0 if {z} > 0.0 else 0.0)",
    "sin"     : "(math.nan if math.isinf({z}) else math.sin({z}))",
    "cos"     : "(math.nan if math.isinf({z}) else math.cos({z}))",
    "gaussian": "math.exp(-{z} * {z} / 2.0)",
    "tanh"    : "math.tanh({z})",
    "sigmoid" : "1.0 / (1.0 + math.exp(-min(max({z}, -100.0), 100.0)))",
    "inverse" : "(1.0 / {z} if not abs({z}) < 1e-7 else (1e7 if {z} >= 0.0 else -1e7))",
    "abs"     : "abs({z})",
    "relu"    : "(0.0 if {z} <= 0.0 else {z})"
    }
