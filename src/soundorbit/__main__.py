from soundorbit.cli import main

main()
