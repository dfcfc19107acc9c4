''' OKFORTH : run with `python .` from the project directory '''

from interpreter import main

main()
