import sys

from pypilots.demo import main

sys.exit(main())
