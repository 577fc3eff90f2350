"""
shell.py

Interactive command shell around a Session.

Commands:
load DICT LANG LEN: switch to another dictionary.
s(tatus): show dictionary and corpus sizes.
g(uess) WORD RESULT: apply the outcome RESULT (e.g. -CCmC) seen for WORD.
l(ist): show the remaining candidates.
c(alculate): rank guesses by entropy.
a(ssess) WORD: show how WORD splits the candidates.
m(atch) ANSWER GUESS: show the outcome of GUESS against ANSWER.
r(eset), h(elp), q(uit).
"""

import argparse
import logging

import numpy as np

from wordle_assist.errors import LoadError, WordleError
from wordle_assist.session import Session
from wordle_assist.words import DEFAULT_DICT, DEFAULT_LANG, DEFAULT_WORD_LEN


TOP_CHOICES = 10
LIST_LIMIT = 50
LIST_PER_LINE = 10
ASSESS_LIMIT = 10
PROMPT = "Wordle > "
HELP_TEXT = (
    "Available commands: "
    "load, s(tatus), g(uess), l(ist), c(alculate), a(ssess), m(atch), "
    "r(eset), h(elp), q(uit)."
)


class Shell:
    def __init__(self, session, workers=1, top=TOP_CHOICES, progress=False, data_dir=None):
        self.session = session
        self.workers = workers
        self.top = max(1, int(top))
        self.progress = progress
        self.data_dir = data_dir
        self.should_exit = False

        self.commands = {}
        for names, handler in (
            (("load",), self.cmd_load),
            (("s", "status"), self.cmd_status),
            (("g", "guess"), self.cmd_guess),
            (("l", "list"), self.cmd_list),
            (("c", "calc", "calculate"), self.cmd_calculate),
            (("a", "assess"), self.cmd_assess),
            (("m", "match"), self.cmd_match),
            (("r", "reset"), self.cmd_reset),
            (("h", "help", "?"), self.cmd_help),
            (("q", "quit", "exit"), self.cmd_quit),
        ):
            for name in names:
                self.commands[name] = handler

    def process_input(self, line):
        """Run one command line. Returns False when the command was rejected."""
        args = line.split()
        if not args:
            return False

        cmd = args[0].lower()
        handler = self.commands.get(cmd)
        if handler is None:
            print(f'Unrecognized command "{cmd}". Type "help" for instructions.')
            return False

        try:
            return handler(args[1:])
        except WordleError as exc:
            print(exc)
            return False

    def run(self):
        while not self.should_exit:
            try:
                line = input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                break
            self.process_input(line)

    def cmd_load(self, args):
        if len(args) != 3:
            print("Format: load <dict_name> <dict_lang> <word_len>")
            return False
        dict_name, dict_lang, word_len = args
        try:
            word_len = int(word_len)
        except ValueError:
            print("Format: load <dict_name> <dict_lang> <word_len>")
            return False

        try:
            session = Session.load(dict_name, dict_lang, word_len, self.data_dir)
        except LoadError as exc:
            print("Failed to load Wordle.")
            print(exc)
            return False

        self.session = session
        return True

    def cmd_status(self, args):
        status = self.session.status()
        print(
            f"Current wordle: {status['dict_name']}/{status['dict_lang']}, "
            f"word_len = {status['word_len']}"
        )
        print(
            f"Dictionary size: answers = {status['answer_count']}, "
            f"full = {status['guess_count']}"
        )
        return True

    def cmd_guess(self, args):
        if len(args) != 2:
            print("Format: guess <guess> <result>")
            return False
        guess, result = args
        count = self.session.filter(guess, result)
        print(f"{count} candidates left.")
        return True

    def cmd_list(self, args):
        count = self.session.candidate_count()
        print(f"{count} candidates left.")
        words = self.session.candidates(LIST_LIMIT)
        for start in range(0, len(words), LIST_PER_LINE):
            print(" ".join(words[start:start + LIST_PER_LINE]))
        return True

    def cmd_calculate(self, args):
        choices = self.session.calculate(workers=self.workers, progress=self.progress)
        for rank, choice in enumerate(choices[:self.top], start=1):
            print(f"{rank}: {self.session.guess_word(choice)} {choice.entropy:.3f}")

        count = self.session.candidate_count()
        print(f"{count} candidates (entropy = {np.log2(count):.3f}).")
        return True

    def cmd_assess(self, args):
        if len(args) != 1:
            print("Format: assess <guess>")
            return False

        assessment = self.session.assess(args[0])
        word_len = self.session.word_len
        for group in assessment.groups:
            size = len(group.answer_ids)
            shown = [
                self.session.answer_word(answer_id)
                for answer_id in group.answer_ids[:ASSESS_LIMIT]
            ]
            line = f"{group.code.to_text(word_len)} ({size}): " + " ".join(shown)
            if size > ASSESS_LIMIT:
                line += " ..."
            print(line)
        print(f"entropy = {assessment.entropy:.3f}")
        return True

    def cmd_match(self, args):
        if len(args) != 2:
            print("Format: match <answer> <guess>")
            return False
        answer, guess = args
        code = self.session.match(answer, guess)
        print(f"Result: {code.to_text(len(answer))}, raw = {code.value}")
        return True

    def cmd_reset(self, args):
        self.session.reset()
        return True

    def cmd_help(self, args):
        print(HELP_TEXT)
        return True

    def cmd_quit(self, args):
        self.should_exit = True
        return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Interactive entropy-ranked Wordle assistant."
    )
    parser.add_argument(
        "-dict",
        default=DEFAULT_DICT,
        help=f"Dictionary name under the data directory (default: {DEFAULT_DICT}).",
    )
    parser.add_argument(
        "-lang",
        default=DEFAULT_LANG,
        help=f"Dictionary language (default: {DEFAULT_LANG}).",
    )
    parser.add_argument(
        "-length",
        type=int,
        default=DEFAULT_WORD_LEN,
        help=f"Word length (default: {DEFAULT_WORD_LEN}).",
    )
    parser.add_argument(
        "-data-dir",
        type=str,
        default=None,
        help="Directory holding <dict>/<lang>/answers.txt and full.txt.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=1,
        help="Worker processes for calculate (default: 1).",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_CHOICES,
        help=f"Number of ranked guesses to show (default: {TOP_CHOICES}).",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar while calculating.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Log dictionary loads and calculation timings.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        session = Session.load(args.dict, args.lang, args.length, args.data_dir)
    except LoadError as exc:
        raise SystemExit(f"Failed to create Wordle: {exc}") from exc

    Shell(
        session,
        workers=args.workers,
        top=args.top,
        progress=args.progress,
        data_dir=args.data_dir,
    ).run()


if __name__ == "__main__":
    main()
