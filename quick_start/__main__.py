from quick_start.cli import main

main()
