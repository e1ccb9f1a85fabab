import sys
from torneo.main import main

sys.exit(main())
