"""Allow ``python -m relsum``."""

from relsum.main import main

main()
