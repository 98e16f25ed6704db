"""Allow running dnsctl as ``python -m dnsctl``."""

from dnsctl.cli import main

if __name__ == "__main__":
    main()
