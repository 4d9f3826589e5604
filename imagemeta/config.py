"""
Configuration constants for imagemeta.
"""

# --- Capture Time ---
# EXIF DateTimeOriginal is always "YYYY:MM:DD HH:MM:SS"
CAPTURE_TIME_FORMAT = "%Y:%m:%d %H:%M:%S"

# --- Tags of Interest (exifread naming, without the IFD prefix) ---
ORIENTATION_TAG = 'Orientation'              # 0x0112
CAPTURE_TIME_TAG = 'DateTimeOriginal'        # 0x9003
CAMERA_MODEL_TAG = 'Model'                   # 0x0110
CAMERA_SERIAL_TAG = 'BodySerialNumber'       # 0xA431

# exifread prefixes every key with the IFD it was found in.
# The primary image is IFD0 plus the sub-IFDs it points to.
PRIMARY_IFDS = ('Image', 'EXIF', 'GPS', 'Interoperability')
THUMBNAIL_IFDS = ('Thumbnail',)

# --- Sidecar Output ---
SIDECAR_SUFFIX = '.json'
JSON_INDENT = 2

# --- Logging ---
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
