import sys

from villagers.main import main

sys.exit(main())
