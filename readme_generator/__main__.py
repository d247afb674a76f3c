import sys

from readme_generator.pipeline import main

sys.exit(main())
