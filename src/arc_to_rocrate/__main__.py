"""Allow ``python -m arc_to_rocrate [PATH]``."""

from arc_to_rocrate.main import main

main()
