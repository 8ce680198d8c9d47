from onelink.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha256": HashAlgorithmName.SHA256,
    "blake3": HashAlgorithmName.BLAKE3,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content fingerprint algorithm (both give 256-bit digests):\n"
    "  sha256  : SHA-256 (default)\n"
    "  blake3  : BLAKE3, faster on large files\n"
    "Use the same algorithm for every run into one store.\n"
)

EPILOG_TEXT = """
Examples:
  Link every photo and video from two card dumps into one store
  %(prog)s /mnt/store /mnt/card1 /mnt/card2

  Only JPEG files, 4 workers, with a log line per file
  %(prog)s /mnt/store ~/Pictures --extension '^\\.jpe?g$' -j 4 -v

  Keep default media types but skip any "cache" directory
  %(prog)s /mnt/store ~/Pictures --skip-dir '^cache$'

Output and inputs must be on the same filesystem: the store holds hard links.
Once a run completes the input trees can be deleted; re-running is always safe.
"""
