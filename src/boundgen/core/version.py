from importlib import metadata

try:
    BOUNDGEN_VERSION = metadata.version("boundgen")
except metadata.PackageNotFoundError:
    # Local run without installation
    BOUNDGEN_VERSION = "dev"
