from talend2postman.cli import main

main(prog_name="talend2postman")
