import logging

import java_checkstyle as jc

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    # parse modifiers
    code = "@Override static public final void run() { synchronized (this) { } }"
    for modifiers in jc.parse_compilation_unit(code).modifiers:
        print(modifiers.generate(), [flag.text for flag in modifiers.flags])

    # check modifier order
    code = "public class Demo {\n    final static int COUNT = 1;\n    abstract public void run();\n}"
    checker = jc.Checker.from_config(["ModifierOrder"])
    for message in checker.process(code, file_name="Demo.java"):
        print(jc.format_message(message))
