"""Module execution entrypoint: `python -m smoke_service`."""

from smoke_service.main import main

main()
