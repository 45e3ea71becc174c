import sys

from commit_spell.main import main

sys.exit(main())
