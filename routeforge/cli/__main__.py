from routeforge.cli import main

main()
