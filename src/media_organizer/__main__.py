from media_organizer.cli import main

main()
