import sys

from typetrainer.main import main

sys.exit(main())
