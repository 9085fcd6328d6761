import logging
import warnings

def setup_clean_logging():
    """Quiet third-party chatter before loading models and decoding images"""

    # Pillow logs every plugin it probes at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)

    # torchvision/torch deprecation notices around pretrained weights
    warnings.filterwarnings('ignore', category=UserWarning, module='torchvision')
    warnings.filterwarnings('ignore', category=FutureWarning, module='torch')

    # Pillow warns on very large images; the upload cap already bounds them
    warnings.filterwarnings('ignore', message='.*DecompressionBombWarning.*')
