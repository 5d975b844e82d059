import sys

from html_component_engine.cli import main

sys.exit(main())
