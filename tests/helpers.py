import os


def absolute_sample_path(relative_sample_path):
    """Path of a file below the ``samples`` directory of the checkout."""
    sample_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../samples"))
    return os.path.join(sample_dir, relative_sample_path)
