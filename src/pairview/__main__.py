from pairview.entry_points import main

main()
